# JUnit XML element and attribute names
TESTSUITES = "testsuites"
TESTSUITE = "testsuite"
TESTCASE = "testcase"
FAILURE = "failure"
ERROR = "error"
SKIPPED = "skipped"

NAME_ATTR = "name"
TIMESTAMP_ATTR = "timestamp"
TIME_ATTR = "time"
CLASSNAME_ATTR = "classname"
MESSAGE_ATTR = "message"
