"""
Configuration file for the creature ecosystem.

All simulation parameters can be adjusted here.
"""

# ==============================================================================
# SCREEN AND WORLD
# ==============================================================================

SIZE_X = 960                    # World width in pixels
SIZE_Y = 540                    # World height in pixels
TILE_SIZE = 10                  # Tile edge length in pixels
UPDATE_RATE = 60                # Ticks per second in window mode

# ==============================================================================
# TERRAIN
# ==============================================================================

# Post-sigmoid elevation thresholds
WATER_ELEVATION = 0.2689
MOUNTAIN_ELEVATION = 0.9

# Sigmoid applied to raw elevation
ELEVATION_SIGMOID_SCALE_X = 1
ELEVATION_SIGMOID_SCALE_Y = 1
ELEVATION_SIGMOID_SHIFT_X = 1
ELEVATION_SIGMOID_SHIFT_Y = 0

# Raw elevation = amplitude * noise + offset
ELEVATION_NOISE_AMPLITUDE = 3.0
ELEVATION_NOISE_OFFSET = 0.5
NOISE_SCALING_FACTOR = 0.03     # Noise coordinate step per tile
NOISE_FIELD_SIZE = 256          # Side of the smoothed random field
NOISE_SIGMA = 4.0               # Gaussian smoothing of the field
NOISE_RESOLUTION = 32.0         # Field cells per unit of noise coordinate

# Nutrition (soil only)
NUTRITION_MAX = 100.0           # Ceiling of the lowest soil tile
BASE_NUTRITION_FRACTION = 0.5   # Starting nutrition as a fraction of ceiling
NUTRITION_REGEN_RATE = 0.05     # Scaled by sqrt(MOUNTAIN_ELEVATION - elevation)
DEPLETED_TINT = 1.2             # Color shift per unit of nutrition deficit
RECOVERED_TINT = 0.8            # Color shift per unit of nutrition surplus

# Movement energy cost per terrain class
SOIL_ENERGY_USE = 1.0
WATER_ENERGY_USE = 3.0
MOUNTAIN_ENERGY_USE = 5.0

# Base colors (low end, high end of each class's elevation range)
WATER_COLOR_DEEP = (10, 40, 120)
WATER_COLOR_SHALLOW = (50, 120, 200)
SOIL_COLOR_LOW = (60, 150, 60)
SOIL_COLOR_HIGH = (130, 110, 70)
MOUNTAIN_COLOR_LOW = (120, 120, 120)
MOUNTAIN_COLOR_HIGH = (240, 240, 240)
BORDER_COLOR = (0, 0, 0)

# ==============================================================================
# CREATURE GENOME
# ==============================================================================

CREATURE_SIZE_MIN = 4           # Radius in pixels
CREATURE_SIZE_MAX = 10
CREATURE_ATTACK_MIN = 0
CREATURE_ATTACK_MAX = 50
CREATURE_DEFENSE_MIN = 0
CREATURE_DEFENSE_MAX = 50
CREATURE_COLOR_MIN = 0
CREATURE_COLOR_MAX = 255
CREATURE_MARKER_MIN = 0
CREATURE_MARKER_MAX = 100
CREATURE_VARIANCE_MIN = 0       # Genetic variance between generations
CREATURE_VARIANCE_MAX = 1
CREATURE_LINEAR_V_MIN = 0       # Pixels per tick
CREATURE_LINEAR_V_MAX = 10
CREATURE_ANGULAR_V_MIN = 0      # Degrees per tick
CREATURE_ANGULAR_V_MAX = 30

# Derived from size by linear interpolation
CREATURE_MAXENERGY_MIN = 400
CREATURE_MAXENERGY_MAX = 1000
CREATURE_MAXHEALTH_MIN = 40
CREATURE_MAXHEALTH_MAX = 100
CREATURE_ENERGY_USE_RATE_MIN = 7.0
CREATURE_ENERGY_USE_RATE_MAX = 11.5

# ==============================================================================
# CREATURE BEHAVIOR
# ==============================================================================

CREATURE_HEALTH_REGENERATION_RATE = 0.2
MOVEMENT_COST_SCALING = 0.05    # Terrain cost per pixel moved per pixel of size
EAT_THRESHOLD = 0.8             # Eat output activation threshold
EAT_COST = 25                   # Energy spent on every eat action
CREATURE_VISION_DISTANCE_MAX = 100

# ==============================================================================
# REPRODUCTION
# ==============================================================================

REPRODUCE_THRESHOLD = 0.8       # Reproduce output activation threshold
REPRODUCE_HEALTH_FRACTION = 0.5
REPRODUCE_ENERGY_FRACTION = 0.6
REPRODUCTION_COOLDOWN = 120     # Ticks between reproductions
OFFSPRING_JITTER = 10           # Max offspring offset from parent in pixels
LARGE_MUTATION_CHANCE = 0.01
LARGE_MUTATION_FACTOR = 5.0

# ==============================================================================
# NEURAL NETWORK ARCHITECTURE
# ==============================================================================

HIDDEN_SIZE = 10                # Single hidden layer

# ==============================================================================
# SIMULATION
# ==============================================================================

POPULATION_FLOOR = 60           # Random creatures are injected below this
HISTORY_WINDOW = 600            # Population history samples kept
LOG_INTERVAL = 10               # Ticks between CSV population log rows

# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================

def print_config():
    """Print current configuration."""
    print("\n" + "="*70)
    print("CONFIGURATION SUMMARY")
    print("="*70)

    print(f"\n[World]")
    print(f"  Size: {SIZE_X}x{SIZE_Y} px, tiles of {TILE_SIZE} px")
    print(f"  Update rate: {UPDATE_RATE}/s")

    print(f"\n[Terrain]")
    print(f"  Water <= {WATER_ELEVATION}, Mountain >= {MOUNTAIN_ELEVATION}")
    print(f"  Nutrition max: {NUTRITION_MAX}, regen: {NUTRITION_REGEN_RATE}")

    print(f"\n[Creatures]")
    print(f"  Size: {CREATURE_SIZE_MIN}-{CREATURE_SIZE_MAX}")
    print(f"  Max energy: {CREATURE_MAXENERGY_MIN}-{CREATURE_MAXENERGY_MAX}")
    print(f"  Max health: {CREATURE_MAXHEALTH_MIN}-{CREATURE_MAXHEALTH_MAX}")
    print(f"  Eat threshold: {EAT_THRESHOLD}, cost: {EAT_COST}")

    print(f"\n[Reproduction]")
    print(f"  Threshold: {REPRODUCE_THRESHOLD}, cooldown: {REPRODUCTION_COOLDOWN} ticks")
    print(f"  Large mutation: {LARGE_MUTATION_CHANCE*100:.0f}% x{LARGE_MUTATION_FACTOR}")

    print(f"\n[Simulation]")
    print(f"  Population floor: {POPULATION_FLOOR}")

    print("="*70 + "\n")

if __name__ == "__main__":
    print_config()
