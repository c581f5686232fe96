"""Geographic primitives, shared types and errors."""
