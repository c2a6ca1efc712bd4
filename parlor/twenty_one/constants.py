"""Twenty-One constants."""

# Highest total that is not a bust
BUST_LIMIT = 21

# The dealer keeps drawing while below this total
DEALER_STAND_TOTAL = 17

# An ace counts 11, or 1 when 11 would bust the hand
ACE_ADJUSTMENT = 10

CARDS_PER_INITIAL_DEAL = 2

DEALER_NAMES = ("R2D2", "Hal", "Chappie", "Sonny", "Number 5")
