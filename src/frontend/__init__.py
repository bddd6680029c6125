"""Flask UI and JSON API on top of concordance.Engine."""
