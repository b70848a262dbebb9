"""Game rules for a small space trading and combat simulation: vectors, quaternions, cargo, equipment, comms, effects, particles, input and save files."""

__version__ = "0.1.0"