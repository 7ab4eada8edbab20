"""Sonar server integration: verification, traversal, rule/violation sync.

Split into:
  - api.py       : all HTTP calls (connection probe + requests-backed client)
  - client.py    : the ServerClient capability and the client factory
  - resources.py : project -> module traversal
  - violations.py: violation fetching
  - rules.py     : deduplicated rule collection
  - severity.py  : severity -> highlight mapping
  - sync.py      : one sync pass over the registered providers
  - providers.py : default providers writing JSON snapshots
  - config.py    : env / .env / settings-file loading
  - types.py     : small shared data structures

The sonar_cli.py script acts as the orchestration layer.
"""
