"""Example: Route Finding on a Small Transit Network with labelgraph

Builds a directed multigraph of stations joined by named lines, then finds
the route with the fewest rides and, on a second graph of travel times, the
fastest route.
"""

import labelgraph as lg


def example_fewest_rides():
    """Example: Fewest rides between two stations, labeled by line."""
    print("=" * 60)
    print("Example 1: Fewest Rides (breadth-first)")
    print("=" * 60)

    network = lg.Graph()
    for station in ["Central", "Harbor", "Market", "Museum", "Park"]:
        network.add_node(station)

    # Several lines may serve the same pair of stations
    network.add_edge("Central", "Market", "red")
    network.add_edge("Central", "Market", "blue")
    network.add_edge("Market", "Museum", "blue")
    network.add_edge("Central", "Harbor", "green")
    network.add_edge("Harbor", "Museum", "green")
    network.add_edge("Museum", "Park", "red")

    route = lg.shortest_path(network, "Central", "Park")
    print(f"Route: {' -> '.join(str(step) for step in route)}")
    print(f"Rides: {len(route) // 2}")

    missing = lg.shortest_path(network, "Park", "Central")
    print(f"Park to Central: {'no route' if missing is None else missing}")
    print()


def example_fastest_route():
    """Example: Fastest route when edges carry travel minutes."""
    print("=" * 60)
    print("Example 2: Fastest Route (least total minutes)")
    print("=" * 60)

    minutes = lg.Graph()
    for station in ["Central", "Harbor", "Market", "Museum", "Park"]:
        minutes.add_node(station)

    minutes.add_edge("Central", "Market", 4.0)
    minutes.add_edge("Central", "Market", 6.5)  # slower parallel line
    minutes.add_edge("Market", "Museum", 5.0)
    minutes.add_edge("Central", "Harbor", 2.0)
    minutes.add_edge("Harbor", "Museum", 3.0)
    minutes.add_edge("Museum", "Park", 4.0)
    minutes.add_edge("Central", "Park", 15.0)

    route = lg.least_weighted_path(minutes, "Central", "Park")
    total = lg.path_weight(minutes, route)
    print(f"Route: {' -> '.join(route)}")
    print(f"Total minutes: {total:.1f}")

    W = lg.weight_matrix(minutes)
    print(f"Weight matrix shape: {W.shape}")
    print()


def main():
    example_fewest_rides()
    example_fastest_route()
    print("All route examples completed")


if __name__ == "__main__":
    main()
