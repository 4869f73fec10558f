import pytest

from property_formatter.modules.vocabulary import default_vocabulary

RENTAL_MESSAGE = """[25/3, 2:15 pm]
Rental
Owner Rahul Sharma 9876543210
Baner
Near Balewadi High Street, Pan card club road
Opp. Orchid school
2 BHK
Semi furnished
Carpet area 950 sq.ft
(3 of 7 floors)
East facing
5 years old
Rent 25000
Deposit 50000
Family
Available now
Property Code: R-1021
"""

RESALE_MESSAGE = """[10:05 AM, 26/03/2024]
Resale
Owner Priya Kulkarni 9123456780
Kharad
Lane 3
3 BHK
Fully furnished
Built up area 1450 sqft
1.25 Cr
1.1 Cr negotiable
Ready to move
"""

MASKED_MESSAGE = """[27/3, 9:00 am]
Rental
Owner Amit 98765*****
Wakad
1 BHK
"""

PRICE_ON_REQUEST_MESSAGE = """[28/3, 11:30 am]
Rental
Owner Sneha 9988776655
Viman Nagar Lane 7, near Phoenix Market City
1 RK
Unfurnished
Price on request
2 Months
Bachelors (Men Only)
"""


@pytest.fixture
def vocab():
    return default_vocabulary()


@pytest.fixture
def rental_message():
    return RENTAL_MESSAGE


@pytest.fixture
def chat_export():
    return RENTAL_MESSAGE + RESALE_MESSAGE + MASKED_MESSAGE + PRICE_ON_REQUEST_MESSAGE
