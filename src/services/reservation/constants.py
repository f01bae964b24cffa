import os

SERVICE_NAME = os.getenv("POWERTOOLS_SERVICE_NAME", "reservation-service")
