from jupiter_registry.pipeline import main

main()
