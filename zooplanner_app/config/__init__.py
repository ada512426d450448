"""
Settings, logging and husbandry rule constants.
"""
