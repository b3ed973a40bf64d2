from adapters.telegram.handlers import start, games, schedule, settings

# State-specific handlers live in each tab router; start has the entry points
routers = [
    start.router,
    games.router,      # Games tab + admin upload form (CreateMatchStates)
    schedule.router,   # Schedule tab + archive
    settings.router,   # Settings tab (ProfileEdit / Feedback / DeleteAccount states)
]

__all__ = ["routers"]
