"""
Serverless entrypoint for the suggest-projects function
"""
from suggest_engine.main import app

# For Vercel
handler = app
