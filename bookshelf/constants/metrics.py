class Constants:
    class Metric:
        HUNDRED_SAMPLING_RATE = 1
        INCREMENT_COUNT = 1
        API_LATENCY = "request_latency"
        API_COUNT = "request_count"
        API_ERROR = "request_error"

    class Tag:
        PATH = "path"
        METHOD = "method"
        CODE = "code"
        ERROR = "error"
