"""opal — collection utilities and financial basics."""
