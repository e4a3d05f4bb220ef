"""Page objects for the TodoMVC application."""
