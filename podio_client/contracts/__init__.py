"""
Contracts (data models).

Request/response shapes exchanged with the Podio API. API classes in
podio_client.clients accept and return these instead of ad-hoc dicts.
"""
