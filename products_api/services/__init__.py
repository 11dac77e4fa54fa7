"""Services Layer: product handlers orchestrating repository calls around core logic."""
