from dna_tiler.scripts.align_dna import main


if __name__ == '__main__':
    raise SystemExit(main())
