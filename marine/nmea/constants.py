"""Wire-format constants for NMEA 0183 sentences.

Sentence structure:
    $GPGGA,120044.567,6011.552,N,02501.941,E,1,00,2.0,28.0,M,19.6,M,,*63\\r\\n
    ^|   | |                                                             |  |
    || id| +-- fields, separated by ','                                  |  +-- terminator
    |talker                                                              +-- '*' + checksum
    begin char ('$', or '!' for AIS)
"""

BEGIN_CHAR = "$"
ALTERNATIVE_BEGIN_CHAR = "!"
BEGIN_CHARS = (BEGIN_CHAR, ALTERNATIVE_BEGIN_CHAR)

FIELD_DELIMITER = ","
CHECKSUM_DELIMITER = "*"
TERMINATOR = "\r\n"

# Conventional maximum length including begin char and terminator. Only
# checked on request.
MAX_LENGTH = 82

# Proprietary sentences carry a single 'P' instead of a two-letter talker id,
# e.g. $PUBX or $PRWIILOG.
PROPRIETARY_TALKER_ID = "P"

# Commonly seen talker ids. The set is open: unknown ids are still parsed.
KNOWN_TALKER_IDS = {
    "AB": "Independent AIS base station",
    "AI": "Mobile AIS station",
    "BS": "Base AIS station",
    "GA": "Galileo",
    "GB": "BeiDou",
    "GL": "GLONASS",
    "GN": "Combined GNSS solution",
    "GP": "GPS",
    "GQ": "QZSS",
    "HC": "Compass, magnetic",
    "HE": "Gyro, north seeking",
    "II": "Integrated instrumentation",
    "IN": "Integrated navigation",
    "P": "Proprietary",
    "SD": "Depth sounder",
    "ST": "Raymarine SeaTalk",
    "VD": "Velocity sensor, Doppler",
    "WI": "Weather instrument",
}

# Sentence ids whose payload is AIS data and may span several sentences.
AIS_SENTENCE_IDS = ("VDM", "VDO")
