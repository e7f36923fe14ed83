"""
The MODEL layer contains pure data structures and layout logic.
It has NO knowledge of the GUI (Qt).
It deals with the tree, the radial geometry, interaction state and I/O.
"""
