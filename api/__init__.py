"""Vercel-style API entrypoint package."""
