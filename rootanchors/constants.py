DEFAULT_FORMAT = "text"
DS_TTL = 0
