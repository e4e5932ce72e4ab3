import numpy as np

from utils.image_io import load_images, ensure_output_dir
from sampling.intensity import ImageIntensitySampler
from sampling.neighbors import DelaunayNeighborGraph
from sampling.stippling import stipple
from detectors.pipeline import run_edge_pipeline

from visualization.save_outputs import save_all_outputs

from config import (
    INPUT_IMAGE_PATTERN,
    OUTPUT_FOLDER,
    get_active_params,
)


def process_image(image, image_name: str, output_dir: str = OUTPUT_FOLDER):
    """
    Runs the complete pipeline for one image:
      1. Weighted stippling (point distribution phase)
      2. Delaunay neighbor graph
      -- one-way switch into edge extraction --
      3. Edge scoring
      4. Adaptive thresholds
      5. Graph hysteresis
      6. Chain building
      7. Chain smoothing
      8. Save all outputs (voronoi, stipple, edges, mask, chains, sobel)

    Returns the PipelineResult.
    """

    print(f"\n=== Processing image with name: {image_name} ===")
    params = get_active_params()

    # ------------------------------
    # STEP 1 — STIPPLING
    # ------------------------------
    sampler = ImageIntensitySampler(image)
    rng = np.random.default_rng(params["RANDOM_SEED"])
    points = stipple(
        sampler,
        n=params["POINT_COUNT"],
        iterations=params["STIPPLE_ITERATIONS"],
        rate=params["RELAX_RATE"],
        rng=rng,
        verbose=True,
    )

    # ------------------------------
    # STEP 2 — NEIGHBOR GRAPH
    # ------------------------------
    graph = DelaunayNeighborGraph(points)

    # ------------------------------
    # STEPS 3-7 — EDGE EXTRACTION
    # ------------------------------
    print("[INFO] Running full adaptive edge pipeline")
    result = run_edge_pipeline(points, graph, sampler, params["SMOOTH_ITERATIONS"])

    t = result.thresholds
    print(
        f"[INFO] high={t.high:.1f} low={t.low:.1f} connect={t.connect:.2f} | "
        f"edges={len(result.edges)} kept={len(result.kept)} chains={len(result.chains)}"
    )
    if not result.kept:
        print(f"[WARN] No edges kept for {image_name}.")

    # ------------------------------
    # STEP 8 — SAVE OUTPUTS
    # ------------------------------
    save_all_outputs(
        output_dir=output_dir,
        image_id=image_name,
        base_image=image,
        points=points,
        kept_edges=result.kept,
        smoothed_chains=result.smoothed,
    )

    print(f"[OK] Finished {image_name}")
    return result


def main():
    """
    Main entry point:
      - Loads images
      - Processes each one independently (a failure, including a failed
        write, is reported and only skips that image)
      - Saves output files
    """
    ensure_output_dir(OUTPUT_FOLDER)

    images, names = load_images(INPUT_IMAGE_PATTERN)
    if not images:
        print(f"[ERROR] No images matched pattern: {INPUT_IMAGE_PATTERN}")
        return

    for img, name in zip(images, names):
        try:
            process_image(img, name)
        except (ValueError, IndexError, OSError) as exc:
            print(f"[ERROR] {name}: {exc}")

    print("\n=== All images processed ===")


if __name__ == "__main__":
    main()
