import os

# Allow the pygame screen tests to open a hidden display on machines without one.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
