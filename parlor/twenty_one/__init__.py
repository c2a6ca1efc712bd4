"""
Twenty-One: a Blackjack-style card game against a computer dealer.

Hand scoring, table rules and the dealer policy, the participants, round
snapshots, and the game controller with its command line entry point.
"""
