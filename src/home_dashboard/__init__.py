"""Personal home dashboard: transit, weather, garden and work schedule."""
