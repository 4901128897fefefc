"""
Storefront app.

This app holds the shop-wide settings the public website reads:
- SiteSettings: singleton with the site name, contact email and currency

Related apps:
    - authentication: IsSiteAdmin guards updates
    - payments: checkout uses the same currency codes
"""
