"""Data anchor: plain Python structures that hold all class data.

Nothing here knows about accessors or hooks. Keeping the data in a module
with no behavior means the behavior modules (and the classes that use them)
can be reloaded while the values persist.
"""

# class identifier -> attribute name -> value
class_data: dict[str, dict[str, object]] = {}

# Process-wide tracing toggle (see classdata.reloadable.set_debug)
debug: bool = False
