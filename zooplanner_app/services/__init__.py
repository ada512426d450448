"""
Business logic: species catalog, comfort and admission rules, allocation engine.
"""
