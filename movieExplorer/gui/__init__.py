"""
gui
~~~
All Qt widgets and the controller behind them.

•  No HTTP here – lookups go through `metadata.api_clients` on worker threads.
•  Re-export the high-level symbols so the app can simply:

    from movieExplorer.gui import MainWindow, SearchController
"""

from movieExplorer.gui.controller  import SearchController
from movieExplorer.gui.main_window import MainWindow
from movieExplorer.gui.movie_card  import MovieCard

__all__ = ["SearchController", "MainWindow", "MovieCard"]
