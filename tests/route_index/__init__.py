"""Route index tests: keys, snapshots, rescans, snippets."""
