"""Read-only views of a PlayField: text dumps and a pygame renderer."""
