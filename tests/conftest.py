"""Shared test setup."""

import matplotlib

# Headless: no test may open a window
matplotlib.use("Agg")
