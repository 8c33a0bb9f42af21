"""
GrubDash — Sample records

Loaded into fresh repositories when SEED_DATA is enabled. Builders return
new model instances on every call so applications never share records.
"""
from grubdash.schemas.dish import Dish
from grubdash.schemas.order import Order

SEED_DISHES = [
    {
        "id": "d351db2b49b69679504652ea1cf38241",
        "name": "Dolcelatte and chickpea spaghetti",
        "description": "Spaghetti topped with a blend of dolcelatte and fresh chickpeas",
        "price": 19,
        "image_url": "https://images.pexels.com/photos/1279330/pexels-photo-1279330.jpeg?h=530&w=350",
    },
    {
        "id": "3c637d011d844ebab1205fef8a7e36ea",
        "name": "Broccoli and beetroot stir fry",
        "description": "Crunchy stir fry featuring fresh broccoli and beetroot",
        "price": 15,
        "image_url": "https://images.pexels.com/photos/4144234/pexels-photo-4144234.jpeg?h=530&w=350",
    },
    {
        "id": "90c3d873684bf381dfab29034b5bba73",
        "name": "Falafel and tahini bagel",
        "description": "A warm bagel filled with falafel and tahini",
        "price": 6,
        "image_url": "https://images.pexels.com/photos/4560606/pexels-photo-4560606.jpeg?h=530&w=350",
    },
]

SEED_ORDERS = [
    {
        "id": "f6069a542257054114138301947672ba",
        "deliverTo": "1600 Pennsylvania Avenue NW, Washington, DC 20500",
        "mobileNumber": "(202) 456-1111",
        "status": "out-for-delivery",
        "dishes": [{"dishId": "90c3d873684bf381dfab29034b5bba73", "quantity": 1}],
    },
    {
        "id": "5a887d326e83d3c5bdcbee398ea32aff",
        "deliverTo": "308 Negra Arroyo Lane, Albuquerque, NM",
        "mobileNumber": "(505) 143-3369",
        "status": "delivered",
        "dishes": [{"dishId": "d351db2b49b69679504652ea1cf38241", "quantity": 2}],
    },
    {
        "id": "4cce6fd5b8b7e4d1d9f2ee67a0d8e2f3",
        "deliverTo": "742 Evergreen Terrace, Springfield",
        "mobileNumber": "(939) 555-7334",
        "status": "pending",
        "dishes": [
            {"dishId": "3c637d011d844ebab1205fef8a7e36ea", "quantity": 1},
            {"dishId": "90c3d873684bf381dfab29034b5bba73", "quantity": 3},
        ],
    },
]


def seed_dishes() -> list[Dish]:
    return [Dish.model_validate(d) for d in SEED_DISHES]


def seed_orders() -> list[Order]:
    return [Order.model_validate(o) for o in SEED_ORDERS]
