"""
zooplanner - decides which zoo enclosures can take a new batch of animals.
"""
