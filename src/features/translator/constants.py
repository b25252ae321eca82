import datetime

DEFAULT_TIMEOUT = datetime.timedelta(seconds=15)

USER_AGENT = "QuickTranslateApp/1.0"
CONTENT_TYPE = "application/json; charset=utf-8"

MTRANSERVER_TRANSLATE_PATH = "/translate"
