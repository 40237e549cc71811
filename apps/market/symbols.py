# ===== apps/market/symbols.py =====

# ================================================================
# NSE SYMBOLS (offline lookup for the trade form)
# ================================================================
NSE_SYMBOLS = [
    {"symbol": "RELIANCE", "name": "Reliance Industries Ltd", "sector": "Energy"},
    {"symbol": "TCS", "name": "Tata Consultancy Services Ltd", "sector": "Technology"},
    {"symbol": "HDFCBANK", "name": "HDFC Bank Ltd", "sector": "Finance"},
    {"symbol": "INFY", "name": "Infosys Ltd", "sector": "Technology"},
    {"symbol": "ICICIBANK", "name": "ICICI Bank Ltd", "sector": "Finance"},
    {"symbol": "HINDUNILVR", "name": "Hindustan Unilever Ltd", "sector": "FMCG"},
    {"symbol": "ITC", "name": "ITC Ltd", "sector": "FMCG"},
    {"symbol": "SBIN", "name": "State Bank of India", "sector": "Finance"},
    {"symbol": "BHARTIARTL", "name": "Bharti Airtel Ltd", "sector": "Technology"},
    {"symbol": "KOTAKBANK", "name": "Kotak Mahindra Bank Ltd", "sector": "Finance"},
    {"symbol": "LT", "name": "Larsen & Toubro Ltd", "sector": "Other"},
    {"symbol": "AXISBANK", "name": "Axis Bank Ltd", "sector": "Finance"},
    {"symbol": "BAJFINANCE", "name": "Bajaj Finance Ltd", "sector": "Finance"},
    {"symbol": "MARUTI", "name": "Maruti Suzuki India Ltd", "sector": "Auto"},
    {"symbol": "SUNPHARMA", "name": "Sun Pharmaceutical Industries Ltd", "sector": "Pharma"},
    {"symbol": "WIPRO", "name": "Wipro Ltd", "sector": "Technology"},
    {"symbol": "TITAN", "name": "Titan Company Ltd", "sector": "Other"},
    {"symbol": "ZOMATO", "name": "Zomato Ltd", "sector": "Technology"},
    {"symbol": "PAYTM", "name": "One97 Communications Ltd", "sector": "Technology"},
    {"symbol": "NYKAA", "name": "FSN E-Commerce Ventures Ltd", "sector": "Technology"},
    {"symbol": "IRCTC", "name": "Indian Railway Catering & Tourism Ltd", "sector": "Other"},
    {"symbol": "HAL", "name": "Hindustan Aeronautics Ltd", "sector": "Other"},
    {"symbol": "TATAMOTORS", "name": "Tata Motors Ltd", "sector": "Auto"},
    {"symbol": "TATASTEEL", "name": "Tata Steel Ltd", "sector": "Metal"},
    {"symbol": "ADANIENT", "name": "Adani Enterprises Ltd", "sector": "Other"},
    {"symbol": "ZYDUSLIFE", "name": "Zydus Lifesciences Ltd", "sector": "Pharma"},
    {"symbol": "DRREDDY", "name": "Dr Reddy's Laboratories Ltd", "sector": "Pharma"},
    {"symbol": "CIPLA", "name": "Cipla Ltd", "sector": "Pharma"},
    {"symbol": "HCLTECH", "name": "HCL Technologies Ltd", "sector": "Technology"},
    {"symbol": "DLF", "name": "DLF Ltd", "sector": "Realty"},
]

SEARCH_LIMIT = 8


def search_symbols(query: str, limit: int = SEARCH_LIMIT):
    """Symbol prefix or company-name substring match, case-insensitive."""
    q = (query or "").strip().upper()
    if not q:
        return []

    return [
        s for s in NSE_SYMBOLS
        if s["symbol"].startswith(q) or q in s["name"].upper()
    ][:limit]
