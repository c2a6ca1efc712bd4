"""
Tic-Tac-Toe against a heuristic computer opponent.

The board, match rules, the computer's move strategy, the participants,
round and match snapshots, and the game controller with its command line
entry point.
"""
