"""Bus and train trip planner for a fixed transit dataset."""
