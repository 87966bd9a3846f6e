"""Weather risk, activity suitability and hazard proximity scoring."""
