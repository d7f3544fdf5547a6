"""
The MODEL layer contains pure data structures and curve mathematics.
It has NO knowledge of the GUI (Qt) or the Visualization (PyVista).
"""
