"""Scenekit runtime modules: logging, config, frame clock, async pump and host."""
