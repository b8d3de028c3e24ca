"""CV improvement suggestions and cover letters from a CV and a job posting."""

__version__ = "0.1.0"
