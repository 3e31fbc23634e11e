"""Discord cogs loaded by the bridge bot."""
