"""
The MODEL layer contains pure data structures and the calculator logic.
It has NO knowledge of the GUI (Qt).
It deals with the key catalogue, the state machine and display formatting.
"""
