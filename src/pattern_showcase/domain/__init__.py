"""Domain layer - the participants of each design pattern example."""
