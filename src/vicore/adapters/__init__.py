"""Alternative hosts for the editor core."""
