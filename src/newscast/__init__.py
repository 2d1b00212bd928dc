"""
Newscast - Automated News to Podcast Pipeline

This package provides tools to:
1. Fetch today's top headlines from NewsAPI
2. Use an LLM to draft a spoken-word podcast script
3. Convert the script to speech with ElevenLabs
"""

__version__ = "0.1.0"
__author__ = "Newscast Team"
