"""Configuration management."""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    """Application configuration."""
    
    # Open Library endpoints
    SEARCH_URL = os.getenv("OPENLIBRARY_SEARCH_URL", "https://openlibrary.org/search.json")
    BOOKS_URL = os.getenv("OPENLIBRARY_BOOKS_URL", "https://openlibrary.org/api/books")
    COVERS_URL = os.getenv("OPENLIBRARY_COVERS_URL", "https://covers.openlibrary.org")
    PLACEHOLDER_COVER_URL = os.getenv("PLACEHOLDER_COVER_URL", "https://via.placeholder.com/150")
    
    USER_AGENT = os.getenv("USER_AGENT", "book-library/1.0")
    
    # Defaults
    DEFAULT_TIMEOUT = float(os.getenv("DEFAULT_TIMEOUT", "10"))
