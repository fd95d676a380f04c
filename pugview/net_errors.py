# pugview/net_errors.py
# Numbers follow chromium's src/net/base/net_error_list.h
FAILED = -2
FILE_NOT_FOUND = -6
