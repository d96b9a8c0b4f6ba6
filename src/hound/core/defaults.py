"""Fixed defaults applied when a config leaves a field unset."""

DEFAULT_MS_BETWEEN_POLL = 30000
DEFAULT_MAX_CONCURRENT_INDEXERS = 2
DEFAULT_PUSH_ENABLED = False
DEFAULT_POLL_ENABLED = True
DEFAULT_TITLE = "Hound"
DEFAULT_VCS = "git"
DEFAULT_HEALTH_CHECK_URI = "/healthz"

DEFAULT_BASE_URL = "{url}/blob/master/{path}{anchor}"
DEFAULT_ANCHOR = "#L{line}"

# Azure DevOps repos are browsed through a query string rather than a path
AZURE_DEVOPS_MARKER = "visualstudio.com"
DEFAULT_BASE_URL_AZURE_DEVOPS = "{url}/?path=%2F{path}&version=GBmaster&line={anchor}"
DEFAULT_ANCHOR_AZURE_DEVOPS = "&line={line}"
