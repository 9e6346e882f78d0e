class InternalURIs:
    API = "/api"
    FACTCHECK = API + "/factcheck"
    HTTPCHECK = API + "/httpcheck"

    # HTML views
    HOME = "/"
    SEARCH = "/search"
    LOAD_MORE = "/more"
    URL_CHECK = "/httpcheck"


class ExternalURIs:
    CLAIM_SEARCH = "https://factchecktools.googleapis.com/v1alpha1/claims:search"
    THREAT_MATCHES_FIND = "https://safebrowsing.googleapis.com/v4/threatMatches:find"


class SafeBrowsing:
    CLIENT_ID = "factcheck-web"
    CLIENT_VERSION = "1.0.0"
    THREAT_TYPES = (
        "MALWARE",
        "SOCIAL_ENGINEERING",
        "UNWANTED_SOFTWARE",
        "POTENTIALLY_HARMFUL_APPLICATION",
    )
    PLATFORM_TYPES = ("ANY_PLATFORM",)
    THREAT_ENTRY_TYPES = ("URL",)


DEFAULT_LANG = "th"
DEFAULT_PAGE_SIZE = "10"
RATING_FILTERS = ("", "false", "misleading", "true", "correct")
