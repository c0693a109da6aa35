"""Meme search web app: search form over a remote meme/image API."""
