"""
Demo dairy network around Bangalore.

Coordinates and capacities for farms, collection centres, processing
plants, distribution hubs and retail outlets. Used by the tests and handy
for trying the engine without a facility catalog. sample_facilities()
builds fresh Facility records on every call.
"""

from coldchain.ontology import Facility, FacilityKind

# 6 dairy farms: id -> (name, latitude, longitude, litres per day).
# capacity == production for farms.
FARMS = {
    "farm_1": ("Hoskote Integrated Dairy Farm", 13.0683, 77.7983, 15000),
    "farm_2": ("Devanahalli Cattle Ranch", 13.2519, 77.7019, 12000),
    "farm_3": ("Doddaballapur Dairy Collective", 13.2247, 77.5678, 18000),
    "farm_4": ("Ramanagara Organic Farm", 12.7208, 77.2836, 8000),
    "farm_5": ("Kolar Dairy Cooperative", 13.1372, 78.1297, 20000),
    "farm_6": ("Tumkur Milk Producers", 13.3422, 77.1019, 14000),
}

# 6 collection centres: id -> (name, latitude, longitude, storage litres).
COLLECTION_CENTERS = {
    "cc_1": ("Hoskote Collection Hub", 13.0600, 77.7900, 5000),
    "cc_2": ("Devanahalli Milk Center", 13.2500, 77.7000, 4000),
    "cc_3": ("Doddaballapur Cooperative", 13.2200, 77.5600, 6000),
    "cc_4": ("Ramanagara Collection Point", 12.7200, 77.2800, 3000),
    "cc_5": ("Nelamangala Center", 13.1019, 77.3958, 4500),
    "cc_6": ("Tumkur District Hub", 13.3400, 77.1000, 8000),
}

# 5 processing plants: id -> (name, latitude, longitude, litres per day).
PROCESSING_PLANTS = {
    "plant_1": ("Nandini Dairy Processing Plant", 13.0358, 77.5542, 200000),
    "plant_2": ("Heritage Fresh Processing Hub", 12.9698, 77.7500, 150000),
    "plant_3": ("Dodla Dairy Yelahanka", 13.0977, 77.5842, 180000),
    "plant_4": ("Amul Processing Center", 12.9719, 77.5937, 120000),
    "plant_5": ("Mother Dairy Plant", 13.0200, 77.6400, 100000),
}

# 2 distribution hubs: id -> (name, latitude, longitude, capacity litres).
DISTRIBUTORS = {
    "dist_1": ("Bangalore Central Distribution Hub", 12.9716, 77.5946, 50000),
    "dist_2": ("Electronic City Distribution Center", 12.8456, 77.6603, 30000),
}

# 4 retail outlets: id -> (name, latitude, longitude, capacity, daily demand).
RETAILERS = {
    "retail_1": ("More Megastore - Koramangala", 12.9352, 77.6245, 2000, 1500),
    "retail_2": ("Big Bazaar - Whitefield", 12.9698, 77.7500, 1800, 1200),
    "retail_3": ("Reliance Fresh - Jayanagar", 12.9279, 77.5937, 1500, 1000),
    "retail_4": ("Spencer's - Indiranagar", 12.9719, 77.6412, 1200, 800),
}


def sample_facilities() -> list[Facility]:
    """All 23 demo facilities, visible, in chain order."""
    facilities = []
    for fid, (name, lat, lon, litres) in FARMS.items():
        facilities.append(Facility(fid, name, FacilityKind.PRODUCER, lat, lon,
                                   capacity=litres, production=litres))
    for fid, (name, lat, lon, storage) in COLLECTION_CENTERS.items():
        facilities.append(Facility(fid, name, FacilityKind.COLLECTION, lat, lon, capacity=storage))
    for fid, (name, lat, lon, throughput) in PROCESSING_PLANTS.items():
        facilities.append(Facility(fid, name, FacilityKind.PROCESSING, lat, lon, capacity=throughput))
    for fid, (name, lat, lon, cap) in DISTRIBUTORS.items():
        facilities.append(Facility(fid, name, FacilityKind.DISTRIBUTOR, lat, lon, capacity=cap))
    for fid, (name, lat, lon, cap, demand) in RETAILERS.items():
        facilities.append(Facility(fid, name, FacilityKind.RETAIL, lat, lon,
                                   capacity=cap, demand=demand))
    return facilities
