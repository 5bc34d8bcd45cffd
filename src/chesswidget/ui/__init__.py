"""Qt rendering and gesture layer for the board widget."""
