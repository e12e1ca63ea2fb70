"""CLI tests using click's CliRunner against real project trees."""
