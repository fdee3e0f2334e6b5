"""
Static company content: service catalogue, default team roster and testimonials.
Used by the marketing generator and the seed-team CLI command.
"""

SERVICES = [
    {
        "id": "sales",
        "title": "Property Sales",
        "description": "Find your dream home or investment property with our extensive portfolio of "
                       "residential and commercial properties across Islamabad and Lahore.",
    },
    {
        "id": "rentals",
        "title": "Property Rentals",
        "description": "Browse our curated selection of rental homes, apartments, and commercial spaces. "
                       "Flexible terms and competitive rates to suit every need.",
    },
    {
        "id": "maintenance",
        "title": "Property Maintenance",
        "description": "Complete property care including repairs, renovations, and routine maintenance.",
    },
    {
        "id": "management",
        "title": "Property Management",
        "description": "Full-service property management, from tenant screening to rent collection.",
    },
    {
        "id": "consultation",
        "title": "Real Estate Consultation",
        "description": "Expert guidance on property investments, market analysis, and strategic planning.",
    },
    {
        "id": "investment",
        "title": "Investment Opportunities",
        "description": "Access exclusive investment properties in Pakistan's growing real estate market.",
    },
]

COMPANY_STATS = [
    ("Properties Sold", "500+"),
    ("Happy Clients", "1000+"),
    ("Years Experience", "15+"),
    ("Active Listings", "200+"),
]

TESTIMONIALS = [
    {
        "name": "Asad Mehmood",
        "role": "Homeowner",
        "text": "Qanzak Global made buying our dream home in F-11 an absolute pleasure. "
                "Professional service from start to finish.",
    },
    {
        "name": "Hina Tariq",
        "role": "Property Investor",
        "text": "Their investment guidance helped me build a strong property portfolio. "
                "Returns have exceeded my expectations.",
    },
]

COMPANY_PROFILE = (
    "{name} is a premier real estate company serving Islamabad and Lahore. With over 15 years of "
    "industry experience, we have helped thousands of clients find their dream properties and make "
    "sound investment decisions."
)

HOME_BUYER_TIPS = [
    "Set Your Budget Realistically",
    "Research the Location Thoroughly",
    "Inspect the Property Professionally",
    "Verify All Legal Documents",
    "Work with Trusted Professionals",
]

DEFAULT_TEAM = [
    {
        "name": "Muhammad Naushad Anjum",
        "role": "CEO & Founder",
        "department": "Executive Leadership",
        "specialization": "Strategic Planning, Business Development, Real Estate Investment",
        "bio": "Muhammad Naushad Anjum is the founder and CEO of Qanzak Global Properties. With extensive "
               "experience in the real estate industry, he has built Qanzak Global into a trusted name "
               "in Islamabad and Lahore's property market.",
        "short_bio": "Leader driving Qanzak Global's success with a commitment to client satisfaction.",
        "email": "naushad@qanzakglobal.com",
        "phone": "+92 331 1479800",
        "whatsapp": "923311479800",
        "photo": "/images/team/naushad.png",
    },
    {
        "name": "Shahzad Ahmad",
        "role": "Director of Sales",
        "department": "Sales & Marketing",
        "specialization": "Property Sales, Client Acquisition, Market Analysis, Commercial Properties",
        "bio": "Shahzad Ahmad serves as the Director of Sales at Qanzak Global Properties, bringing years "
               "of expertise in property sales and client relations.",
        "short_bio": "Expert in property sales with deep market knowledge across Islamabad and Lahore.",
        "email": "shahzad@qanzakglobal.com",
        "phone": "+92 331 1479800",
        "whatsapp": "923311479800",
        "photo": "/images/team/shahzad.png",
    },
    {
        "name": "Adeel",
        "role": "Property Manager",
        "department": "Property Management & Maintenance",
        "specialization": "Property Maintenance, Tenant Relations, Property Inspections",
        "bio": "Adeel is the Property Manager at Qanzak Global Properties, responsible for ensuring all "
               "properties under management are maintained to the highest standards.",
        "short_bio": "Property manager ensuring the highest standards of maintenance and quality.",
        "email": "adeel@qanzakglobal.com",
        "phone": "+92 331 1479800",
        "whatsapp": "923311479800",
        "photo": "/images/team/adeel.png",
    },
    {
        "name": "Fatima",
        "role": "Client Relations Manager",
        "department": "Customer Service & Client Relations",
        "specialization": "Customer Service, Client Communication, Inquiry Management",
        "bio": "Fatima is the Client Relations Manager at Qanzak Global Properties, dedicated to providing "
               "exceptional service to every client throughout their property journey.",
        "short_bio": "Building lasting relationships through exceptional service and client care.",
        "email": "fatima@qanzakglobal.com",
        "phone": "+92 331 1479800",
        "whatsapp": "923311479800",
        "photo": "/images/team/fatima.png",
    },
]
