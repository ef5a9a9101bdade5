"""The interactive menu: a pure state machine and the console loop that drives it."""
