"""Story Spoiler API integration suite.

Authenticates against the remote Story Spoiler API and runs an ordered
create/edit/list/delete scenario, checking status codes and response bodies.
"""

__version__ = "0.1.0"
