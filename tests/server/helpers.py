"""Sample lines for server tests."""

GLL = "$GPGLL,6011.552,N,02501.941,E,120045,A*26"
GGA = "$GPGGA,120044.567,6011.552,N,02501.941,E,1,00,2.0,28.0,M,19.6,M,,*63"
UBX = "$PUBX,00,1,2"

AIS_SINGLE = "!AIVDM,1,1,,A,403OviQuMGCqWrRO9>E6fE700@GO,0*4D"
AIS_PART1 = "!AIVDM,2,1,1,A,55?MbV02;H;s<HtKR20EHE:0@T4@Dn2222222216L961O5Gf0NSQEp6ClRp8,0*1C"
AIS_PART2 = "!AIVDM,2,2,1,A,88888888880,2*25"
AIS_PAYLOAD = (
    "55?MbV02;H;s<HtKR20EHE:0@T4@Dn2222222216L961O5Gf0NSQEp6ClRp8" "88888888880"
)
AIS_BAD_PAYLOAD = "!AIVDM,1,1,,A,XYZ,0"
AIS_SHORT_PAYLOAD = "!AIVDM,1,1,,A,15,0"

BAD_CHECKSUM = "$GPGLL,6011.552,N,02501.941,E,120045,A*00"
UNKNOWN_TYPE = "$GPXYZ,1,2"
