"""
The MODEL layer contains the free-group word algebra, the word tree and its layout.
It has NO knowledge of the GUI (Qt).
"""
