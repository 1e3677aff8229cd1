"""Command-line interface: argument schema, dispatch and terminal playback."""
