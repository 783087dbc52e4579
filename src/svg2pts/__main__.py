from svg2pts.cli import main

main()
