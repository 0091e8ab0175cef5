"""ArenaDeck: Arena deck model with color, wildcard, layout and export views."""
