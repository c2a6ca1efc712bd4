"""Cards, deck, hands, participants and the IO seam shared by both games."""
