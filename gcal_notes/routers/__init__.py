"""
Routers module - API endpoint handlers organized by feature.

Each router handles one surface of the plugin:
- views: Google Calendar day view panel
- commands: Command palette entries
- settings: Settings tab
- notices: Transient user notices
"""
