"""
The CONTROLLER layer owns mutable application state and drives the model.
"""
