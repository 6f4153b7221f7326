"""Monthly expense calculator with a themed PyQt6 view.

Modules:
- config: settings file persistence (theme flag, style settings)
- style: palettes and style sheet helpers
- ledger: in-memory expense ledger and derived totals
- ui: UI helpers (items, toggle button, panels)
- app: the calculator window and entry point
"""

__version__ = "0.1.0"
