"""Single-scene 3D showcase built on scenekit."""
