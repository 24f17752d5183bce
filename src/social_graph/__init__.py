"""Social Graph - friendship network analysis.

Answers four kinds of questions about a network of users and the friends
they declare:
- Friend suggestions from multi-hop mutual connections
- Degree of separation between two users
- Connected components ranked by size
- Most influential users and overall network statistics
"""

__version__ = "0.1.0"
__author__ = "Social Graph Team"
