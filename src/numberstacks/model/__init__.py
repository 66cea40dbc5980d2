"""
The MODEL layer contains pure data structures and number logic.
It has NO knowledge of the GUI (Qt).
It deals with primality, factor pairs, colours and grid sizes.
"""
