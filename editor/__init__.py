"""
Wang Fill - Editor Package

Editing algorithms built on the Wang tile core: region filling and brush
constraint construction.
"""
