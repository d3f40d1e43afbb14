"""
PremiumCore API

Run with:
    uvicorn premiumcore.api.main:app
"""
