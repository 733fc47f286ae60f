"""FastAPI front end for the NMEA sentence engine."""
