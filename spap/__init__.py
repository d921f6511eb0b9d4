"""
SPAP - Single-Page-Application Publisher.

Serves a static SPA build out of S3 behind API Gateway:
- core: Path resolution, object reading and response building
- infrastructure: Object storage (S3 and in-memory mock)
- config: Application configuration
- lambda_function: AWS Lambda entry point
- api, main: FastAPI server for local development
"""

__version__ = "0.1.0"
