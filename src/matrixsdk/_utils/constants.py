# Environment variables
ENV_HOMESERVER_URL = "MATRIX_HOMESERVER_URL"
ENV_ACCESS_TOKEN = "MATRIX_ACCESS_TOKEN"

# Headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_USER_AGENT = "User-Agent"

# Client-Server API paths
CLIENT_VERSIONS_PATH = "/_matrix/client/versions"
WELL_KNOWN_CLIENT_PATH = "/.well-known/matrix/client"
CLIENT_R0 = "/_matrix/client/r0"

# Login flow types
LOGIN_TOKEN = "m.login.token"
LOGIN_PASSWORD = "m.login.password"
LOGIN_DUMMY = "m.login.dummy"
ID_USER = "m.id.user"
