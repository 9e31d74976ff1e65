"""watchlist: an in-memory checklist ("My WatchList") with a console front end."""

__version__ = "0.1.0"
