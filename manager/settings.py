SETTINGS_TEMPLATE = {
    "default": {"debug": False},
    "telegram": {"token": ""},  # telegram robot token
    "verify": {
        "timeout": 300,  # seconds to answer the question
        "operand_min": 1,
        "operand_max": 10,
    },
    "filter": {
        "enabled": True,  # enable banned words detection
        "words": "广告,垃圾,恶意链接",  # comma-separated banned words
    },
}
