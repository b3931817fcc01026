"""Application constants."""

USER_AGENT = "npsp-da/1.0 (+development applications; contact: configured-email)"

DEFAULT_MAIN_URL = "https://ecouncil.npsp.sa.gov.au/eservice/daEnquiryInit.do?doc_typ=155&nodeNum=10209"
DEFAULT_SEARCH_URL_TEMPLATE = (
    "https://ecouncil.npsp.sa.gov.au/eservice/daEnquiry.do?number=&lodgeRangeType=on"
    "&dateFrom={date_from}&dateTo={date_to}&detDateFromString=&detDateToString="
    "&streetName=&suburb=0&unitNum=&houseNum=0%0D%0A%09%09%09%09%09%09&planNumber="
    "&strataPlan=&lotNumber=&propertyName=&searchMode=A&submitButton=Search"
)
DEFAULT_LOOKBACK_MONTHS = 1
DEFAULT_DATABASE = "data.sqlite"

SESSION_COOKIE_NAME = "JSESSIONID_live"
LODGED_DATE_PATTERN = "D/MM/YYYY"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
JSON_LOG_FIELDS = (
    "timestamp",
    "run_id",
    "stage",
    "source",
    "event",
    "status",
    "duration_ms",
    "rows_in",
    "rows_out",
    "error_code",
    "application_number",
    "message",
)
