from .kinematics import KinematicVehicle, VehicleState

__all__ = ["KinematicVehicle", "VehicleState"]
