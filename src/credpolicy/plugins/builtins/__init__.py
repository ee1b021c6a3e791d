"""Built-in plugins shipped with credpolicy."""
