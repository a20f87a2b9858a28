"""Built-in problem instances."""
from data_structures import ProblemDefinition

# beta_i - maximum budget for each television station
TV_MAX_BUDGET = (3356, 2632, 2867, 3215, 3103, 3449, 2825, 3398, 3158, 2657)

# tau_ij - maximum minutes purchasable per station (row) and time slot (column)
TV_CAPACITY = (
    (1, 2, 2, 1, 1, 2, 2, 1),
    (2, 2, 1, 2, 2, 2, 2, 3),
    (1, 1, 2, 1, 1, 2, 2, 3),
    (3, 3, 1, 2, 2, 1, 2, 2),
    (2, 1, 2, 3, 2, 2, 2, 1),
    (2, 2, 2, 3, 2, 3, 1, 1),
    (2, 3, 2, 3, 2, 3, 3, 2),
    (2, 2, 1, 1, 3, 2, 1, 1),
    (3, 2, 2, 2, 3, 1, 3, 2),
    (2, 2, 2, 2, 3, 3, 1, 2),
)

# C_ij - euro per minute
TV_UNIT_COST = (
    (914, 972, 1352, 1299, 1258, 1237, 1276, 1286),
    (1030, 969, 1073, 1234, 1289, 1107, 1357, 1276),
    (1270, 1191, 1393, 1112, 1297, 1296, 1244, 1228),
    (1390, 1121, 1009, 1039, 1107, 993, 1144, 1073),
    (1237, 1345, 1191, 1235, 954, 1314, 976, 953),
    (1065, 1012, 1349, 1145, 1087, 938, 1343, 1356),
    (1235, 970, 998, 900, 1064, 1178, 970, 1056),
    (1159, 1077, 1330, 1261, 1294, 1382, 1190, 1002),
    (996, 1137, 1151, 931, 1067, 986, 1014, 1104),
    (1101, 1354, 1381, 1026, 1374, 986, 1067, 1149),
)

# P_ij - spectators per minute
TV_UNIT_COVERAGE = (
    (1387, 3382, 3496, 1574, 1292, 1989, 2251, 1314),
    (919, 3333, 595, 956, 1299, 2485, 3241, 1642),
    (1546, 2036, 1493, 2429, 2325, 1840, 1124, 3088),
    (2781, 784, 1133, 1203, 1990, 2333, 1046, 2569),
    (2308, 3480, 628, 2628, 2606, 384, 3413, 2764),
    (2348, 392, 3480, 1005, 553, 2536, 2367, 1461),
    (3014, 931, 3194, 1926, 2482, 2680, 947, 359),
    (2712, 3405, 680, 2389, 1517, 2085, 953, 3021),
    (2421, 886, 781, 3246, 3142, 601, 813, 735),
    (911, 2714, 2837, 3135, 3007, 409, 898, 1598),
)


def tv_campaign() -> ProblemDefinition:
    """10 stations x 8 daily slots, 86236 spectators minimum, 2% per slot."""
    return ProblemDefinition(
        capacity=TV_CAPACITY,
        unit_cost=TV_UNIT_COST,
        unit_coverage=TV_UNIT_COVERAGE,
        max_budget=TV_MAX_BUDGET,
        min_coverage=86236,
        min_slot_spend_fraction=0.02,
        name="tv_campaign",
    )


def uniform_pair(min_coverage: float = 20.0) -> ProblemDefinition:
    """2 outlets x 2 slots with identical prices everywhere."""
    return ProblemDefinition(
        capacity=((2, 2), (2, 2)),
        unit_cost=((10, 10), (10, 10)),
        unit_coverage=((5, 5), (5, 5)),
        max_budget=(20, 20),
        min_coverage=min_coverage,
        min_slot_spend_fraction=0.1,
        name="uniform_pair",
    )
