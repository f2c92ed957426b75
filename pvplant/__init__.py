"""Fixed-orientation photovoltaic plant model."""
