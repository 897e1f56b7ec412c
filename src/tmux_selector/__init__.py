"""Pick a tmux pane interactively and print its identifier."""
__version__ = "0.1.0"
