import os

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("KE2DAIRA_LOG_LEVEL", "WARNING").upper()

# Optional Janome user dictionary (IPADIC CSV format) with extra name readings
USER_DICT = os.getenv("KE2DAIRA_USER_DICT", "")
USER_DICT_ENCODING = os.getenv("KE2DAIRA_USER_DICT_ENCODING", "utf8")
