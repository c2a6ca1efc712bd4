"""
parlor: Twenty-One and Tic-Tac-Toe against the computer.

The games live in `parlor.twenty_one` and `parlor.tictactoe`. Both talk to
the outside world only through `parlor.common.io_interface.IOInterface`.
"""

__version__ = "0.1.0"
