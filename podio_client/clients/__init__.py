"""
API classes.

Each class maps its methods one-to-one onto Podio endpoints and talks to
the service only through podio_client.transport.ResourceClient.
"""
