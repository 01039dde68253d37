"""
The MODEL layer contains pure data structures and the generation algorithm.
It has NO knowledge of the GUI (Qt) or the Visualization (PyVista).
"""
