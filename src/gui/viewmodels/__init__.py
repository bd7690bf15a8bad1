"""View models: pure projections from domain state to render descriptions."""
